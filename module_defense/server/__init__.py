"""HTTP/WebSocket adapter exposing the simulation to a browser front end."""
