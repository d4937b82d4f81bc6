"""
pkr Tests

Test Structure:
    unit/: 各模块单元测试
    property/: 基于hypothesis的属性测试
"""
