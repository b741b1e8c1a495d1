"""
Hello World sample app: greets `/hello` or `/hello/{name}` in plain text.
"""
