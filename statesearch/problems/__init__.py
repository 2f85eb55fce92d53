# statesearch/problems/__init__.py
# Concrete state spaces and CSP instances built on the engine.
