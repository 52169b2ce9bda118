# file generated by the release script
version = '1.0.0'
