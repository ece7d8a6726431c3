"""WorkTrack package.

Organized by feature modules (users, timelogs) with a thin Flask controller
layer over service/repository layers, plus a security module for password
hashing and bearer tokens.
"""
