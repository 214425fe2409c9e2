from pathlib import Path
import sys

# Ensure project root on sys.path for direct script execution
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from schedgen.cli.main import run_pipeline
from schedgen.models.preferences import Preferences


def main() -> None:
    # First-semester load with the default optimization
    csv, validation, audit = run_pipeline(
        root,
        [1, 2, 3, 4, 5],
        Preferences(optimizations=["minimize-gaps"]),
    )
    print(csv)
    print(validation)
    print(audit)


if __name__ == "__main__":
    main()
