from connect5 import create_app, socketio

app = create_app()
 
if __name__ == '__main__':
    # Use SocketIO server so /ws notifications work in dev
    socketio.run(app, debug=True)
