"""Decision strategy tests"""
