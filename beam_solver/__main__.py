# beam_solver/__main__.py
# Package entrypoint so you can run:
#   python -m beam_solver --help
# and it will delegate to the CLI.
#
# Examples:
#   python -m beam_solver beams.txt offcuts.txt
#   python -m beam_solver --job job.json --format markdown --out out/

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
