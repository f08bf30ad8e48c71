from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Auth, Database, Functions, Layers

DEFAULT_ALLOWED_ORIGIN = "http://localhost:3000"


class HangarBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # cdk deploy -c allowed_origin=https://... で上書きする
        allowed_origin = (
            self.node.try_get_context("allowed_origin") or DEFAULT_ALLOWED_ORIGIN
        )

        database = Database(self, "Database")
        layers = Layers(self, "Layers")
        auth = Auth(self, "Auth")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            allowed_origin=allowed_origin,
        )

        api = Api(
            self,
            "Api",
            functions=fns,
            user_pool=auth.user_pool,
            allowed_origin=allowed_origin,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "UserPoolId", value=auth.user_pool.user_pool_id)
        CfnOutput(
            self,
            "UserPoolClientId",
            value=auth.user_pool_client.user_pool_client_id,
        )
