# THIS MUST BE THE ABSOLUTE FIRST LINE
import eventlet
eventlet.monkey_patch()

import os

from codequest import create_app, socketio

app = create_app()

if __name__ == '__main__':
    socketio.run(app, debug=os.environ.get('FLASK_DEBUG') == '1')
