SECRET_KEY = "ad-normalizer-tests"
INSTALLED_APPS = [
	"rest_framework",
]
DATABASES = {}
USE_TZ = True
TIME_ZONE = "UTC"
AD_NORMALIZER = {}
