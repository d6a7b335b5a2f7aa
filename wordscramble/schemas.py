from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union

RejectionReason = Literal[
    'already_used',
    'not_composable',
    'too_short',
    'equal_to_root',
    'not_a_real_word',
]

class Accepted(BaseModel):
    kind: Literal['accepted'] = 'accepted'
    points: int

class Rejected(BaseModel):
    kind: Literal['rejected'] = 'rejected'
    reason: RejectionReason

Outcome = Annotated[Union[Accepted, Rejected], Field(discriminator='kind')]

SessionStatus = Literal['uninitialized', 'active']

class SessionState(BaseModel):
    id: str
    rootWord: Optional[str] = None
    score: int = 0
    usedWords: List[str] = []
    status: SessionStatus = 'uninitialized'

class Alert(BaseModel):
    title: str
    message: str

class SubmitRequest(BaseModel):
    word: str

class SubmitResult(BaseModel):
    # outcome is None when the submission was blank and silently ignored
    outcome: Optional[Outcome] = None
    alert: Optional[Alert] = None
    session: SessionState

class WordCheck(BaseModel):
    word: str
    language: str
    valid: bool
