"""
Identity for the storefront.

- Password hashing (bcrypt)
- Signed, time-limited tokens (JWT)
- Registration and login
- Bearer authentication and role gating for routes
"""
