# Application package
