"""
Entry Point Script (Bootstrap)
==============================
Runs the command-line compiler straight from a source checkout.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It puts 'src' on the Python path so 'from forbildshapes...' resolves
   without installing the package first.

Usage:
    $ python run.py "Cylinder: x=0; y=0; z=0; r=5; l=10; axis(0,0,1)"
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from forbildshapes.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
