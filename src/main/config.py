"""
Configuration settings for the JavaScript metrics engine and its front ends.
"""

from typing import List

# Synthetic identifiers of the use-graph
INPUT_SENTINEL: str = "%INPUT%"
OUTPUT_SENTINEL: str = "%OUTPUT%"
SENTINELS: List[str] = [INPUT_SENTINEL, OUTPUT_SENTINEL]

# Calls treated as the program's I/O boundary
PRINT_FUNCTION: str = "print"
PROMPT_FUNCTION: str = "prompt"

# Source discovery
JS_GLOB: str = "*.js"

# Largest syntax tree (in nodes) the front ends hand to the engine
MAX_TREE_NODES: int = 200_000

# Export
OPERATORS_CSV: str = "operators.csv"
OPERANDS_CSV: str = "operands.csv"
PROPERTIES_CSV: str = "properties.csv"
CHEPIN_CSV: str = "chepin.csv"

# Batch processing
DEFAULT_WORKERS: int = 4

# Logging
LOG_FILE_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
