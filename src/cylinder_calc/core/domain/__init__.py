"""Domain types of the calculator.

Pure, frozen value objects plus the formulas they are built from. The domain
knows nothing about consoles, typer or environment variables.
"""
