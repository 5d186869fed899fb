"""Domain port interfaces for hexagonal architecture.

Ports define the interfaces the settings model uses to talk to its
collaborators: the live game (read-only entity enumerations) and the sink
that receives drift warnings. Implementations live outside this package.
"""

from kitsci.foundation.domain.ports.game import GamePort
from kitsci.foundation.domain.ports.warning_sink import WarningSink

__all__ = ["GamePort", "WarningSink"]
