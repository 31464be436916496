import argparse
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from loopguard.audit import find_loop_control_writes


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Report loops that modify their control variable inside the body"
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Python files to check")
    return parser.parse_args(argv)


def check_paths(paths, out=None):
    out = out or sys.stdout
    total = 0
    for path in paths:
        source = path.read_text(encoding="utf-8")
        for finding in find_loop_control_writes(source):
            print(finding.describe(str(path)), file=out)
            total += 1
    return total


def main(argv=None):
    args = parse_args(argv)
    return 1 if check_paths(args.paths) else 0


if __name__ == "__main__":
    sys.exit(main())
