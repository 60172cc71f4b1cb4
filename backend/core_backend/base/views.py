from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView


class BaseAPIView(APIView):
    """
    Base view for endpoints backed by a service operation.

    Service operations return result dicts (see core_backend.base.results);
    ``respond`` turns one into a Response, rendering any payload objects
    through the serializers given in ``payload_serializers``.
    """

    def respond(self, result, payload_serializers=None, success_status=status.HTTP_200_OK):
        if not result.get("ok"):
            return Response(
                {"ok": False, "error": result.get("error")},
                status=status.HTTP_400_BAD_REQUEST,
            )

        data = dict(result)
        for key, serializer_spec in (payload_serializers or {}).items():
            if key not in data:
                continue
            serializer_class, many = serializer_spec
            data[key] = serializer_class(
                data[key], many=many, context={"request": self.request}
            ).data
        return Response(data, status=success_status)
