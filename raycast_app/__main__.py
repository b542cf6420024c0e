from raycast_app.main import run

run()
