# src/tokenlint/config.py

DEFAULT_THRESHOLD = 25000

# Calibrated for Claude's tokenizer on Go code. Actual counts vary slightly.
DEFAULT_RATIO = 0.65

SOURCE_EXTENSION = ".go"

# Argument that expands to a recursive scan of the current directory
RECURSIVE_CWD = "./..."
RECURSIVE_SUFFIX = "/..."

# Generated code, skipped by recursive scans
GENERATED_SEGMENTS = ["/gen/", "_gen.go"]
GENERATED_SUFFIXES = [".pb.go", ".sql.go"]

EXCEEDS_MARKER = " <- EXCEEDS LIMIT"
REMEDIATION_HINT = "Consider splitting into smaller files for better LLM readability"
