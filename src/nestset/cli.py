import argparse
import logging
import sys

from logzero import logger

from nestset.objects.multiset import parse_multiset
from nestset.parser.parser import parse
from nestset.program import Program
from nestset.utils import NestsetError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Evaluate nested multiset scripts and notations')
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('--input_file', '-i', type=str, help='input script file')
    group.add_argument('--expr', '-e', type=str, help='a multiset notation, e.g., "{a, b, {c}}"')
    parser.add_argument('--debug', '-d', action='store_true', help='debug mode')
    return parser.parse_args(argv)


def run_script(input_file: str) -> None:
    logger.info(f'Input file: {input_file}')
    with open(input_file, 'r') as f:
        program: Program = parse(f.read())
    logger.info(f'Program: \n{program}')
    for statement, value in program.run():
        logger.info(f'{statement}: {value}')


def show_notation(text: str) -> None:
    obj = parse_multiset(text)
    logger.info(f'Multiset: {obj}')
    logger.info(f'Cardinality: {obj.cardinality()}, distinct: {obj.distinct_count()}')
    logger.info(f'Boolean: {obj.boolean()}')


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    try:
        if args.input_file is not None:
            run_script(args.input_file)
        else:
            show_notation(args.expr)
    except NestsetError as e:
        logger.error(e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
