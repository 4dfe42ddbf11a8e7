"""
Application package initializer.

The package is split into layers: ``core`` (configuration, logging,
database bootstrap and error kinds), ``models`` (persisted records),
``schemas`` (exchanged values), ``mappers``, ``repositories`` (the
storage gateway), ``services`` (business rules) and ``api`` (HTTP
handlers).  Control always flows from handlers down to storage.
"""
