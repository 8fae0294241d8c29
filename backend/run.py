from gamenight import create_app, socketio

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info(
        f"Game Night server running: port={port} "
        f"websocket=ws://localhost:{port} health=http://localhost:{port}/health"
    )
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, host='0.0.0.0', port=port, debug=True)
