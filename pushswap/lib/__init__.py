"""Small helpers for characters, buffers, strings, lists, formatting and line reading."""