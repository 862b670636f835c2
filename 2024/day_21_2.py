'''
cat day_21_input.txt | python3 day_21_2.py
'''

import sys

from keypad_chain import config, parse_codes, sum_of_complexities
from keypad_chain.logging_config import setup_logging

setup_logging(config.LOG_LEVEL)

codes = parse_codes(sys.stdin.read())
total = sum_of_complexities(codes, config.PART_2_DEPTH)
print("Sum of complexities with %d directional keypads is %d." % (config.PART_2_DEPTH, total))
