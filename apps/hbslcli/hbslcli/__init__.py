"""sline-transpiler command-line interface."""
