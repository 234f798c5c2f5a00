"""
auth — User authentication module.

Provides:
  • Signed bearer token creation & verification
  • Password hashing (bcrypt)
  • Credential store and register / login / me service
  • ``get_current_user`` FastAPI dependency
"""
