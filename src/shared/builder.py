"""Fluent builder base for domain aggregates.

Subclasses record rule violations with ``add_domain_error()`` while they are
being configured and implement ``_construct()``. ``build()`` reports every
violation at once instead of failing on the first one.
"""

from shared.errors import DomainException


class FluentBuilder:
    def __init__(self):
        self._domain_errors = []

    def add_domain_error(self, message):
        self._domain_errors.append(message)

    @property
    def domain_errors(self):
        return list(self._domain_errors)

    def build(self):
        self._validate()
        return self._construct()

    def _validate(self):
        if not self._domain_errors:
            return

        raise DomainException(self._domain_errors)

    def _construct(self):
        raise NotImplementedError(f"{type(self).__name__} must implement _construct()")
