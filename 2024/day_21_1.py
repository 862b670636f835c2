'''
cat day_21_input.txt | python3 day_21_1.py
'''

import sys

from keypad_chain import config, parse_codes, sum_of_complexities
from keypad_chain.logging_config import setup_logging
from keypad_chain.sequencer import code_cost, code_sequences

setup_logging(config.LOG_LEVEL)

codes = parse_codes(sys.stdin.read())
for code in codes:
    print(code, code_sequences(code)[0], code_cost(code, config.PART_1_DEPTH))

total = sum_of_complexities(codes, config.PART_1_DEPTH)
print("Sum of complexities with %d directional keypads is %d." % (config.PART_1_DEPTH, total))
