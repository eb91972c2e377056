"""Dashboard server, routes and view state"""
