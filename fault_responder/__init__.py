"""
fault-responder: translates failed pipeline requests into HTTP error responses.
"""
