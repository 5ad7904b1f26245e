import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list of origins allowed for CORS and Socket.IO
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get('CORS_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173').split(',')
        if origin.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Optional: seed for the random first-mover pick. Unset means unseeded.
    FIRST_MOVER_SEED = int(os.environ['FIRST_MOVER_SEED']) if os.environ.get('FIRST_MOVER_SEED') else None
    # Emit advisory state_update events on /ws after every state change
    SOCKETIO_NOTIFY = os.environ.get('SOCKETIO_NOTIFY', '1') not in ('0', 'false', 'False')
