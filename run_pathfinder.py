#!/usr/bin/env python3
"""
Launcher script for the gridpath pathfinder.
This script sets up the Python path and runs the command-line front end.
"""

import sys
import os

# Add the project root to Python path so that 'gridpath' and 'config' can be imported
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

if __name__ == "__main__":
    from gridpath.main import main
    sys.exit(main(sys.argv[1:]))
