"""Domain service base."""


class Service:
    """Base of the AskAbout domain services.

    A service holds rules that span several aggregates, such as a vote on
    one user's question moving that user's rating in a topic. Services get
    their repositories through the constructor and never open database
    sessions themselves.
    """
