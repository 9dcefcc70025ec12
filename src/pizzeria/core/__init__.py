"""Application kernel: identity, IoC, mediator, errors, config and server."""
