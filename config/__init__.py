# config/__init__.py
"""
Ce fichier fait de config un package Python (settings du projet audit énergétique).
"""
