"""
HoopCount GUI styles.
"""
