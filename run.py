"""
Entry Point Script (Bootstrap)
==============================
Runs the command-line demo straight from a source checkout.

Why is this file needed?
------------------------
It is located outside the 'src' package and puts 'src' on 'sys.path', so
'python run.py --profile sphere' works without installing the package.

Usage:
    $ python run.py --model revolution --profile vase
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from phyllotaxis.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
