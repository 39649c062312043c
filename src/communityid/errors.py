class CommunityIDError(ValueError):
    """Base class for failures computing a Community ID."""


class InvalidFlowError(CommunityIDError):
    """The flow tuple violates an input precondition."""


class DigestError(CommunityIDError):
    """The SHA-1 primitive could not be initialized."""


class ConfigError(CommunityIDError):
    """The seed or encoding setting is out of range."""
