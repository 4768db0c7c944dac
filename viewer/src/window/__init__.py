"""Demo application window and its mixins"""
