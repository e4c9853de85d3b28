"""Token entities"""
