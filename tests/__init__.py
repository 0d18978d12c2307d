from pathlib import Path
import sys

# Tests import solana_sniper straight from src/ so an editable install is optional
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
