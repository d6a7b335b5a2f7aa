from __future__ import annotations
from typing import Dict, Tuple

from .schemas import Alert, RejectionReason

ALERTS: Dict[str, Tuple[str, str]] = {
    'already_used': ("Word used already", "Be more original"),
    'not_composable': ("Word not possible", "You can't spell that word from '{root}'"),
    'too_short': ("Too short", "Stop being lazy and write a nice word"),
    'equal_to_root': ("Word equal to root", "Come on. Are you trying to cheat me?"),
    'not_a_real_word': ("Word not recognized", "You can't just make them up, you know"),
}

def alert_for(reason: RejectionReason, root_word: str) -> Alert:
    title, message = ALERTS[reason]
    return Alert(title=title, message=message.format(root=root_word))
