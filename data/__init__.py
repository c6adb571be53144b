# Reference data package
