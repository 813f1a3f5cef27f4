"""KYC submission and admin review views"""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from ..permissions import IsCustomerOrDriver, IsPlatformAdmin
from ..serializers import KycReviewSerializer, KycSubmitSerializer, KycVerificationSerializer
from ..services import KycService


class KycViewSet(viewsets.ViewSet):
    authentication_classes = [JWTAuthentication]
    permission_classes = [IsCustomerOrDriver]

    def create(self, request):
        serializer = KycSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        kyc = KycService().submit_kyc(request.user, **serializer.validated_data)
        return Response({
            'message': 'KYC documents submitted successfully',
            'kyc': KycVerificationSerializer(kyc).data,
        }, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'], url_path='my-kyc')
    def my_kyc(self, request):
        submissions = KycService().get_user_kyc(request.user)
        return Response(KycVerificationSerializer(submissions, many=True).data)


class AdminKycViewSet(viewsets.ViewSet):
    authentication_classes = [JWTAuthentication]
    lookup_value_regex = r'\d+'
    permission_classes = [IsPlatformAdmin]

    def list(self, request):
        submissions = KycService().list_kyc(status=request.query_params.get('status'))
        return Response(KycVerificationSerializer(submissions, many=True).data)

    def partial_update(self, request, pk=None):
        serializer = KycReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        kyc = KycService().review_kyc(
            pk,
            request.user,
            serializer.validated_data['status'],
            remarks=serializer.validated_data.get('remarks'),
        )
        return Response({
            'message': f'KYC {kyc.status} successfully',
            'kyc': KycVerificationSerializer(kyc).data,
        })


__all__ = ['KycViewSet', 'AdminKycViewSet']
