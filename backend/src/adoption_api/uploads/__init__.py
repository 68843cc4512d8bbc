"""Image upload: storage port, S3 adapter and endpoints"""
