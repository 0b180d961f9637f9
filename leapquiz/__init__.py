"""LEAP vocabulary quiz library.

Subpackages:
- leapquiz.common: Shared utilities (config, logging, key-value cache, errors)
- leapquiz.schema: Record and partition definitions
- leapquiz.input: Word-list extraction (HTML table parsing, validation, imports)
- leapquiz.quiz: Word store, range/partition selection and quiz session state
- leapquiz.output: Text rendering of cards and the terminal command loop
"""
