#!/usr/bin/env python3
"""
Ring Survivor Demonstration Script

Runs the greedy defense pass on the sample ring [1,1,0,1,1,1,0,1,1,1]
and prints the number of lights that remain working.
"""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from ringguard.demo import main


if __name__ == "__main__":
    sys.exit(main())
