#!/usr/bin/env python3
"""
Compara las properties de dos objetos de ejemplo

Uso:
    python scripts/compare_objects.py
    python scripts/compare_objects.py --json
    python scripts/compare_objects.py --log-level DEBUG
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.class_comparator import compare_objects, render_report
from src.utils.logging_setup import setup_logging


class Bean1:
    """Sample bean, version 1"""

    def __init__(self):
        self._id = 1
        self._name = "first"
        self._size = 10
        self._tags = ["a", "b"]

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return self._size

    @property
    def tags(self) -> List[str]:
        return self._tags


class Bean2:
    """Sample bean, version 2: size is a string, name is unset"""

    def __init__(self):
        self._id = 2
        self._name = None
        self._size = "large"
        self._created_by = "admin"

    @property
    def ID(self) -> int:
        return self._id

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def size(self) -> str:
        return self._size

    @property
    def created_by(self) -> str:
        return self._created_by

    @property
    def checksum(self) -> str:
        raise RuntimeError("checksum not computed yet")


def main():
    parser = argparse.ArgumentParser(description="Compare the properties of two sample objects")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-level", default=None, help="Override logging.level")
    args = parser.parse_args()

    setup_logging(level=args.log_level)

    report = compare_objects(Bean1(), Bean2())

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        render_report(report)


if __name__ == "__main__":
    main()
