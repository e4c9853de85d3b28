"""Constant per-chain tables"""
