import os


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-me')
    # Session size used by games that don't set their own.
    QUESTIONS_PER_GAME = int(os.environ.get('QUESTIONS_PER_GAME', 5))
    # Submitted answers are kept in the session cookie, which browsers cap near 4 KB.
    MAX_ANSWER_LENGTH = int(os.environ.get('MAX_ANSWER_LENGTH', 200))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    SOCKETIO_ASYNC_MODE = os.environ.get('SOCKETIO_ASYNC_MODE', 'eventlet')
