from flask import Blueprint

games = Blueprint('games', __name__)

from codequest.games import routes, events  # noqa: E402,F401
