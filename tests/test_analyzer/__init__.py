"""Statistics and trace output tests"""
