from interntrack.settings import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Faster password hashing for login tests
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

INTERNTRACK_LOGO_PATH = ''
