"""Reference strokes and their file format.

The module exports:
    TemplateSet: Immutable, validated set of reference strokes.
    load_template_file: Read a TemplateSet from the reference data file.
    parse_template_lines: Parse reference data from text lines.
    save_template_file: Write a TemplateSet in the reference data format.

Example usage:
    Loading and inspecting the reference set::

        from unistroke_lib.templates import load_template_file

        templates = load_template_file('strokedata.txt')
        for digit, stroke in enumerate(templates):
            print(digit, stroke[0], stroke[-1])
"""

from .loader import load_template_file, parse_template_lines, save_template_file
from .repository import TemplateSet

__all__ = ['TemplateSet', 'load_template_file', 'parse_template_lines', 'save_template_file']
