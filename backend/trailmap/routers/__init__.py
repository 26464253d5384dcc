"""TrailMap Routers"""
