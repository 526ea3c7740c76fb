"""
Space Ship: dodge and shoot falling meteors.
"""
