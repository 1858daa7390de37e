from dayrhythm.api.main import run

run()
