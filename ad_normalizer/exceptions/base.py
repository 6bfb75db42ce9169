from rest_framework.exceptions import APIException
from rest_framework import status


class CoreException(APIException):
	def __init__(self, data=None):
		super().__init__()
		if data is not None:
			self.set_detail(data)
		else:
			self.detail = {
				"code": self.default_code,
				"detail": self.default_detail,
			}

	def set_detail(self, data):
		self.detail = data
		if isinstance(self.detail, dict):
			if "code" not in self.detail:
				self.detail["code"] = self.default_code
			if "detail" not in self.detail:
				self.detail["detail"] = self.default_detail

	def __str__(self):
		if isinstance(self.detail, dict):
			return str(self.detail.get("detail", self.default_detail))
		return str(self.detail)


class InvalidArgument(CoreException):
	status_code = status.HTTP_400_BAD_REQUEST
	default_detail = "Invalid Argument"
	default_code = "invalid_argument"
