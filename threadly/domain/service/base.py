"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span aggregates, e.g. a vote
    changes a post and its author's karma. Services receive the acting
    user's id explicitly and never check credentials.
    """

    pass
