"""
Property Tests - 基于属性的测试
"""
