from __future__ import annotations


class PreconditionError(ValueError):
    pass
