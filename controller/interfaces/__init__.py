"""Decision strategy interfaces"""
