import pytest
from tetris_board import new_board
from tetris_session import GameSession


class RecordingAudio:
    def __init__(self):
        self.muted = False
        self.cues = []

    def play(self, cue):
        self.cues.append(cue)


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def board():
    return new_board()


@pytest.fixture
def session(audio):
    return GameSession(audio=audio, seed=1234)
