"""Entry point: python -m tft.sandbox [module ...]"""
import sys
from .runner import SandboxRunner

runner = SandboxRunner()
modules = sys.argv[1:] or ["dates", "court_days", "models", "deadlines", "validation", "rules", "export", "cli", "runner"]
runner.run(modules)
runner.report()
sys.exit(0 if runner.all_passed else 1)
