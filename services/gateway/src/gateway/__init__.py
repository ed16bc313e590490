"""
Gateway - forwards fixed "add product" requests to the Product Service.
"""
