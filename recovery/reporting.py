# ----- reporting.py -----
import sys
from tabulate import tabulate
from recovery.config import Config

# --- Helper Functions ---
def print_header(title):
    print("\n" + "="*50)
    print(f"{title}")
    print("="*50)

def log(component, message):
    if Config.VERBOSE:
        print(f"[{component}] {message}")

def warn(component, message):
    print(f"[{component}] WARNING: {message}", file=sys.stderr)

def _preview(value, width=None):
    width = width or Config.VALUE_PREVIEW
    text = str(value)
    if len(text) <= width:
        return text
    keep = (width - 3) // 2
    return f"{text[:keep]}...{text[-keep:]} ({len(text)} digits)"

def format_points(points):
    """Render decoded points as a table for the console."""
    rows = [(i, _preview(p.x), _preview(p.y)) for i, p in enumerate(points, 1)]
    return tabulate(rows, headers=["#", "x", "y"], tablefmt=Config.TABLE_FORMAT, disable_numparse=True)
