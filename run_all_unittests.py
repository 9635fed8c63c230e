# run_all_unittests.py
import os
import sys

import unittest

ROOT = os.path.dirname(os.path.abspath(__file__))


def main():
    loader = unittest.TestLoader()

    # unittests/ directories live beside the modules they cover
    suite = loader.discover(start_dir=os.path.join(ROOT, "testgate"), pattern="test_*.py", top_level_dir=ROOT)

    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(main())
