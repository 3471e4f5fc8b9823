import sys
from pathlib import Path

# Ensure the project root is importable during collection, before pytest's
# own pythonpath handling when invoked from another directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)
