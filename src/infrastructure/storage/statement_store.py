"""
Infrastructure Adapters: Statement Store
Implements IStatementStore for AWS S3 and the local filesystem
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from application.ports.statement_store import IStatementStore, CURRENT_STATEMENT_KEY
from domain.entities.statement import Statement
from domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def _decode(raw: bytes | str, source: str) -> Statement:
    """Parse stored JSON into a Statement"""
    try:
        return Statement.from_dict(json.loads(raw))
    except (ValueError, KeyError, TypeError) as e:
        raise PersistenceError(f"Stored statement at {source} is corrupt: {e}")


def _encode(statement: Statement) -> str:
    return json.dumps(statement.to_dict(), ensure_ascii=False, indent=2)


class S3StatementStore(IStatementStore):
    """AWS S3 statement store (one object per environment)"""
    
    def __init__(
        self,
        bucket_name: str,
        aws_access_key: Optional[str] = None,
        aws_secret_key: Optional[str] = None,
        region: str = "ap-southeast-1",
        endpoint_url: Optional[str] = None,
        environment: str = "dev",
        s3_client=None
    ):
        """Initialize S3 client"""
        
        self.bucket_name = bucket_name
        self.region = region
        self.environment = environment  # dev, staging, prod
        self.object_key = f"{environment}/{CURRENT_STATEMENT_KEY}.json"
        
        if s3_client is not None:
            self.s3_client = s3_client
            return
        
        session_kwargs = {"region_name": region}
        
        if aws_access_key and aws_secret_key:
            session_kwargs["aws_access_key_id"] = aws_access_key
            session_kwargs["aws_secret_access_key"] = aws_secret_key
        
        # Add endpoint URL for LocalStack support
        if endpoint_url:
            session_kwargs["endpoint_url"] = endpoint_url
        
        self.s3_client = boto3.client('s3', **session_kwargs)
    
    async def save(self, statement: Statement) -> None:
        """Upload statement JSON to S3"""
        
        try:
            await asyncio.to_thread(
                self.s3_client.put_object,
                Bucket=self.bucket_name,
                Key=self.object_key,
                Body=_encode(statement).encode("utf-8"),
                ContentType="application/json"
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(f"S3 save failed: {e}")
        
        logger.info("Saved statement %s to s3://%s/%s", statement.file_name, self.bucket_name, self.object_key)
    
    def _download(self) -> bytes:
        response = self.s3_client.get_object(Bucket=self.bucket_name, Key=self.object_key)
        return response["Body"].read()
    
    async def load(self) -> Optional[Statement]:
        """Download statement JSON from S3"""
        
        try:
            raw = await asyncio.to_thread(self._download)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                return None
            raise PersistenceError(f"S3 load failed: {e}")
        except BotoCoreError as e:
            raise PersistenceError(f"S3 load failed: {e}")
        
        return _decode(raw, f"s3://{self.bucket_name}/{self.object_key}")
    
    async def clear(self) -> None:
        """Delete statement object from S3"""
        
        try:
            await asyncio.to_thread(
                self.s3_client.delete_object,
                Bucket=self.bucket_name,
                Key=self.object_key
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(f"S3 delete failed: {e}")


class LocalStatementStore(IStatementStore):
    """Local filesystem statement store (fallback when S3 unavailable)"""
    
    def __init__(self, base_path: str = "data/storage"):
        """Initialize local storage"""
        
        self.base_path = Path(base_path)
        self.file_path = self.base_path / f"{CURRENT_STATEMENT_KEY}.json"
    
    async def save(self, statement: Statement) -> None:
        """Write statement JSON to disk"""
        
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
            
            # Atomic replace of the slot file
            tmp_path = self.file_path.with_suffix(".json.tmp")
            tmp_path.write_text(_encode(statement), encoding="utf-8")
            tmp_path.replace(self.file_path)
        except OSError as e:
            raise PersistenceError(f"Local save failed: {e}")
        
        logger.info("Saved statement %s to %s", statement.file_name, self.file_path)
    
    async def load(self) -> Optional[Statement]:
        """Read statement JSON from disk"""
        
        if not self.file_path.exists():
            return None
        
        try:
            raw = self.file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Local load failed: {e}")
        
        return _decode(raw, str(self.file_path))
    
    async def clear(self) -> None:
        """Delete statement file from disk"""
        
        try:
            self.file_path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Local delete failed: {e}")
