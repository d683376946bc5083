''' pointcore: Shared utilities for the pointvector geometry tools.

- config:  Default tolerances, plot styling and logging setup.
- display: Console report output used by the example scripts.

Versioning follows Major.Minor.Patch:

    Major (1.x.x): Public geometry API changed. Old scripts might not run.

    Minor (x.2.x): New operations added, old scripts still work.

    Patch (x.x.5): Bug fixes.
'''
__version__ = "1.0.0"
