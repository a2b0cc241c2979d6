"""
core/errors.py -- Exception taxonomy shared by stores, services, and routes.

  DuplicateKeyError   a UNIQUE constraint fired in the store. Services turn it
                      into a DuplicateKey result ("already exists", 400).
  ApplicationError    store or internal failure, including a zero-row write
                      after a positive existence check. Answered with a
                      generic 500 by the app-level handler.
  ConfigurationError  required configuration (the token signing secret) is
                      missing at the point of use.

Expected outcomes (duplicate, not found, invalid input) do not travel as
exceptions past the service layer -- see core/results.py.
"""


class DuplicateKeyError(Exception):
    """The store refused an insert or update because of a uniqueness constraint."""


class ApplicationError(Exception):
    """Unexpected store or internal failure. The message is logged, never sent to clients."""


class ConfigurationError(Exception):
    """A required configuration value is absent."""
