"""Decision strategy implementations"""
