"""
Product Service - mock third-party API that decodes and echoes products.
"""
