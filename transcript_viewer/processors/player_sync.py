"""Click-to-seek between transcript entries and the embedded player"""

import json
import logging
from typing import List, Optional, Protocol

from ..models import PlaybackState, TranscriptDocument, TranscriptEntry

logger = logging.getLogger(__name__)


def seek_message(seconds: float) -> str:
    """JSON command understood by the YouTube iframe API"""
    return json.dumps({"event": "command", "func": "seekTo", "args": [seconds, True]})


class PlayerChannel(Protocol):
    """Anything that can deliver a message to the player surface"""

    def post_message(self, message: str) -> None:
        ...


class EmbedCommandQueue:
    """Player channel that queues commands for the rendered page

    The transcript page posts the queued messages to the iframe's content
    window once the player has loaded.
    """

    def __init__(self):
        self.messages: List[str] = []

    def post_message(self, message: str) -> None:
        self.messages.append(message)

    def drain(self) -> List[str]:
        messages, self.messages = self.messages, []
        return messages


class PlayerSync:
    """Issue seeks on selection and track the highlighted entry

    Sync is one-way: only explicit selection moves the highlight, player
    progress never does. Seek delivery is best effort; a failed delivery is
    logged and the highlight still moves.
    """

    def __init__(self, channel: Optional[PlayerChannel] = None):
        self.channel = channel
        self.state = PlaybackState()

    def on_select(self, entry: TranscriptEntry) -> PlaybackState:
        """Seek the player to entry.start and mark the entry active

        Returns:
            The new PlaybackState
        """
        if self.channel is not None:
            try:
                self.channel.post_message(seek_message(entry.start))
            except Exception as e:
                logger.warning(f"Seek to {entry.start}s was not delivered: {e}")

        self.state = PlaybackState(active_start=entry.start)
        return self.state

    def select_start(self, document: TranscriptDocument, start: float) -> PlaybackState:
        """Select the first entry whose start equals the given value

        Unknown start values leave the state untouched.
        """
        for entry in document.entries:
            if entry.start == start:
                return self.on_select(entry)
        logger.debug(f"No entry starts at {start}s in {document.video_id}")
        return self.state

    def is_active(self, entry: TranscriptEntry) -> bool:
        return self.state.is_active(entry)

    def reset(self) -> PlaybackState:
        self.state = PlaybackState()
        return self.state
