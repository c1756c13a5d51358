"""
pygame-side rendering for the frame's draw commands.
"""
