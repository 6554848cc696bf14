"""Option deduction: flag record + environment -> view configuration.

Each ``deduce_*`` function resolves one configuration facet. They are pure:
the same flags and environment always give the same value or the same
``OptionsError``.
"""
