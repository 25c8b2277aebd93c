"""
`programs.spec_generator`

This program asks a hosted model for a PromptSpec JSON object built from the dish brief.
"""

from programs.spec_generator.program import SpecGeneratorProgram

__all__ = ["SpecGeneratorProgram"]
