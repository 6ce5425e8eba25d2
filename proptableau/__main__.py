import argparse
import sys

from . import __version__, logger
from .errors import ParseError
from .parser import parse
from .tableau import decide, is_valid


def parseArg():
    """
    CMD argument parsing
    :return: the parser
    """
    parser = argparse.ArgumentParser(prog='proptableau', description='Propositional tableau SAT solver')
    parser.add_argument('-f', '--formula', help='formula to decide; read from stdin if omitted')
    parser.add_argument('--valid', action='store_true', help='check validity instead of satisfiability')
    parser.add_argument('-d', '--debug', action='store_true', help='log every tableau step')
    parser.add_argument('--version', action='version', version='%(prog)s ' + __version__)
    return parser


def main(argv=None) -> int:
    args = parseArg().parse_args(argv)
    logger.setup(args.debug)

    text = args.formula if args.formula is not None else sys.stdin.read()
    try:
        formula = parse(text)
    except ParseError as e:
        print('error: %s' % e, file=sys.stderr)
        return 1

    if args.valid:
        print('VALID' if is_valid(formula) else 'INVALID')
        return 0

    verdict = decide(formula)
    if not verdict:
        print('UNSAT')
        return 0

    print('SAT')
    for name, value in verdict.assignment.items():
        print('%s=%s' % (name, 'true' if value else 'false'))
    return 0


if __name__ == '__main__':
    sys.exit(main())
