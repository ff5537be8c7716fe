# id3_tree/cli.py
import argparse
import sys

from .io import load_dataset, needs_delimiter
from .tree import ID3DecisionTree, DEFAULT_MIN_GAIN


def cmd_args(parser):
    """Arguments for running the command line application"""
    parser.add_argument('file', nargs='?', help='CSV or TXT file to read (prompted for when omitted)')
    parser.add_argument('--delimiter', '-d', help='Field delimiter for TXT files (prompted for when omitted)')
    parser.add_argument('--min-gain', type=float, default=DEFAULT_MIN_GAIN,
                        help='Only split when the best information gain is strictly greater than this. '
                             'Use -1 to always split on the best attribute.')
    parser.add_argument('--verbose', '-v', action='store_true', help='Print every step of the tree induction')
    parser.add_argument('--no-print', action='store_true', help='Do not print the data table and the tree')
    parser.add_argument('--predict', '-p', nargs='+', metavar='ATTR=VALUE',
                        help='Classify one record and exit instead of prompting for guesses')
    return parser


def parse_assignments(assignments):
    """Turn ['Outlook=Sunny', 'Wind=Weak'] into {'Outlook': 'Sunny', 'Wind': 'Weak'}."""
    record = {}
    for assignment in assignments:
        name, sep, value = assignment.partition('=')
        if not sep or not name:
            raise ValueError(f"Expected ATTR=VALUE, got '{assignment}'.")
        record[name] = value
    return record


def format_dataset(dataset):
    lines = [f"There are {len(dataset.headers)} attributes and {dataset.num_samples} data rows.", ""]
    lines.append(", ".join(dataset.headers))
    for row in dataset.rows.tolist():
        lines.append(", ".join(row))
    return "\n".join(lines) + "\n"


def guess_loop(tree, attributes, input_func=input):
    """Prompt for attribute values and print predictions until the user declines."""
    while True:
        choice = input_func("Do you want to make a guess? (y/n): ").strip()
        if choice.lower() != 'y':
            return
        record = {}
        for attribute in attributes:
            record[attribute] = input_func(f"Enter value for {attribute}: ").strip()
        print(f"Prediction: {tree.predict(record)}")


def main(argv=None, input_func=input):
    parser = cmd_args(argparse.ArgumentParser(
        prog='id3-tree',
        description='Induce an ID3 decision tree from a labeled table and classify records with it.'
    ))
    args = parser.parse_args(argv)

    filename = args.file or input_func("Enter CSV or TXT file name to read: ").strip()
    delimiter = args.delimiter
    if delimiter is None and needs_delimiter(filename) and args.file is None:
        delimiter = input_func("Enter the delimiter character for the TXT file (e.g. , . ; |): ").strip()[:1] or None

    try:
        dataset = load_dataset(filename, delimiter)
    except FileNotFoundError:
        print(f"Failed to open file: {filename}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid data in {filename}: {e}", file=sys.stderr)
        return 1

    if not args.no_print:
        print(format_dataset(dataset))

    tree = ID3DecisionTree(min_gain=args.min_gain, verbose=args.verbose)
    tree.fit(dataset)

    if not args.no_print:
        tree.print_tree()

    if args.predict:
        try:
            record = parse_assignments(args.predict)
        except ValueError as e:
            parser.error(str(e))
        print(f"Prediction: {tree.predict(record)}")
        return 0

    guess_loop(tree, dataset.attributes, input_func)
    return 0


if __name__ == '__main__':
    sys.exit(main())
