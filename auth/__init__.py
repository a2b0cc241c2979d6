"""auth/ -- Registration, login, and bearer-token authentication.

Layer rule: auth/ imports only stdlib, third-party libraries, and core/.
It does NOT import from api/ or customers/.
api/ imports from auth/, not the other way around.
"""
