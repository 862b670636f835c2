from .complexity import complexity, numeric_value, parse_codes, sum_of_complexities
from .costs import CostTable, build_ladder, cost, cost_ladder, sequence_cost
from .errors import InvalidButtonError, KeypadChainError, LayoutError, MalformedCodeError
from .keypad import DIRPAD, NUMPAD, Keypad, Location
from .paths import pair_sequences, sequences
from .sequencer import code_cost, code_sequences, expand, press_sequences, validate_code
