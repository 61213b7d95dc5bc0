"""
Persistence back-ends for hours data.

Both stores keep the same two logical documents: the record table with
its schema, and the ordered list of names.

- JsonStore writes ``hours_dataframe.json`` and ``hours_names.json``
  into a directory.
- SqliteStore keeps them in two tables of a SQLite file via peewee.
"""
import json
import logging
import os

from peewee import (
    DatabaseProxy, Model, SqliteDatabase, CharField, IntegerField, PeeweeException
)

from ..utils.errors import ParseError, StoreError
from .dataframe import HoursDataFrame
from .hours_data import HoursData
from .record import HoursRecord, Schema

logger = logging.getLogger(__name__)

DATAFRAME_FILE = "hours_dataframe.json"
NAMES_FILE = "hours_names.json"


class JsonStore:
    """Two pretty-printed JSON documents in one directory"""

    def __init__(self, directory):
        self.directory = os.fspath(directory)

    @property
    def dataframe_path(self) -> str:
        return os.path.join(self.directory, DATAFRAME_FILE)

    @property
    def names_path(self) -> str:
        return os.path.join(self.directory, NAMES_FILE)

    def load(self, **options) -> HoursData:
        dataframe = HoursDataFrame()
        names = []
        try:
            raw = self._read(self.dataframe_path)
            if raw is not None:
                if not isinstance(raw, dict):
                    raise StoreError(f"{self.dataframe_path} must hold a JSON object")
                dataframe = HoursDataFrame.from_dict(raw)
            raw = self._read(self.names_path)
            if raw is not None:
                if not isinstance(raw, list):
                    raise StoreError(f"{self.names_path} must hold a JSON list")
                names = [str(name) for name in raw]
        except ParseError as e:
            logger.error(f"Corrupt record in {self.dataframe_path}: {e}")
            raise StoreError(str(e)) from e

        logger.info(f"Loaded {len(dataframe)} records and {len(names)} names from {self.directory}")
        return HoursData(dataframe=dataframe, names=names, **options)

    def save(self, hours_data: HoursData):
        try:
            os.makedirs(self.directory, exist_ok=True)
            self._write(self.dataframe_path, hours_data.dataframe.to_dict())
            self._write(self.names_path, hours_data.names)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save hours data to {self.directory}: {e}")
            raise StoreError(f"Failed to save hours data: {e}") from e
        logger.info(f"Saved {len(hours_data.dataframe)} records to {self.directory}")

    @staticmethod
    def _read(path):
        if not os.path.exists(path):
            logger.debug(f"{path} does not exist, starting empty")
            return None
        try:
            with open(path, encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise StoreError(f"Failed to read {path}: {e}") from e

    @staticmethod
    def _write(path, document):
        tmp_path = path + ".tmp"
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)


database_proxy = DatabaseProxy()


class BaseModel(Model):
    class Meta:
        database = database_proxy


class RecordRow(BaseModel):
    record_index = IntegerField(null=False, index=True)
    record_rowid = IntegerField(null=False, index=True)
    name = CharField(max_length=100, null=False, index=True)
    year = IntegerField(null=False)
    month = IntegerField(null=False)
    start = CharField(max_length=19, default='')
    end = CharField(max_length=19, default='')
    hours = CharField(max_length=32, default='')

    class Meta:
        table_name = 'hours_record'
        indexes = (
            (('name', 'year', 'month'), False),
        )

    def to_record(self) -> HoursRecord:
        return HoursRecord(
            index=self.record_index,
            rowid=self.record_rowid,
            name=self.name,
            year=self.year,
            month=self.month,
            start=self.start,
            end=self.end,
            hours=self.hours,
        )


class RosterName(BaseModel):
    position = IntegerField(null=False, index=True)
    name = CharField(max_length=100, null=False, unique=True)

    class Meta:
        table_name = 'roster_name'


class SqliteStore:
    """SQLite file holding records and roster in two tables"""

    def __init__(self, path):
        self.path = os.fspath(path)
        self.db = SqliteDatabase(self.path, pragmas={'journal_mode': 'wal'})

    def _connect(self):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        database_proxy.initialize(self.db)
        self.db.connect(reuse_if_open=True)
        self.db.create_tables([RecordRow, RosterName], safe=True)

    def _close(self):
        if not self.db.is_closed():
            self.db.close()

    def load(self, **options) -> HoursData:
        try:
            self._connect()
            rows = RecordRow.select().order_by(RecordRow.record_index.asc(), RecordRow.id.asc())
            records = [row.to_record() for row in rows]
            names = [row.name for row in RosterName.select().order_by(RosterName.position.asc())]
        except (PeeweeException, OSError) as e:
            logger.error(f"Failed to load hours data from {self.path}: {e}")
            raise StoreError(f"Failed to load hours data: {e}") from e
        finally:
            self._close()

        logger.info(f"Loaded {len(records)} records and {len(names)} names from {self.path}")
        dataframe = HoursDataFrame(schema=Schema.default(), data=records)
        return HoursData(dataframe=dataframe, names=names, **options)

    def save(self, hours_data: HoursData):
        try:
            self._connect()
            with self.db.atomic():
                RecordRow.delete().execute()
                RosterName.delete().execute()
                rows = [
                    {
                        'record_index': r.index,
                        'record_rowid': r.rowid,
                        'name': r.name,
                        'year': r.year,
                        'month': r.month,
                        'start': r.start,
                        'end': r.end,
                        'hours': r.hours,
                    }
                    for r in hours_data.dataframe
                ]
                for batch in _chunks(rows, 100):
                    RecordRow.insert_many(batch).execute()
                names = [{'position': i, 'name': name} for i, name in enumerate(hours_data.names)]
                if names:
                    RosterName.insert_many(names).execute()
        except (PeeweeException, OSError) as e:
            logger.error(f"Failed to save hours data to {self.path}: {e}")
            raise StoreError(f"Failed to save hours data: {e}") from e
        finally:
            self._close()
        logger.info(f"Saved {len(hours_data.dataframe)} records to {self.path}")


def _chunks(items, size):
    for i in range(0, len(items), size):
        yield items[i:i + size]
