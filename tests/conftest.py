import os

# ハンドラーモジュールは import 時に boto3 の Table を生成するため、先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("TABLE_NAME", "test-marketplace-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "test-service")
os.environ.setdefault("ALLOWED_ORIGIN", "http://localhost:3000")
