# tests/test_sa/utils.py
from typing import List, Dict, Any
from sqlalchemy import inspect
from sqlalchemy.orm import Session

class DBInspector:
    def __init__(self, session: Session):
        self.session = session
        self.engine = session.get_bind()
        self.inspector = inspect(self.engine)

    def get_table_info(self, table_name: str) -> Dict[str, Any]:
        """Get detailed information about a specific table"""
        return {
            'columns': self.inspector.get_columns(table_name),
            'primary_key': self.inspector.get_pk_constraint(table_name),
            'foreign_keys': self.inspector.get_foreign_keys(table_name),
            'unique_constraints': self.inspector.get_unique_constraints(table_name),
            'indexes': self.inspector.get_indexes(table_name)
        }

    def get_all_tables(self) -> List[str]:
        """Get list of all tables in database"""
        return self.inspector.get_table_names()

def compare_model_to_db(session: Session, model_class) -> List[str]:
    """Compare SQLAlchemy model to actual database table"""
    differences = []
    inspector = DBInspector(session)
    table_name = model_class.__tablename__
    db_info = inspector.get_table_info(table_name)

    # Get model columns
    mapper = inspect(model_class)
    model_columns = {c.key: c for c in mapper.columns}

    # Compare columns
    db_columns = {c['name']: c for c in db_info['columns']}

    # Check for columns in model but not in db
    for col_name in model_columns:
        if col_name not in db_columns:
            differences.append(f"Column '{col_name}' exists in model but not in database")

    # Check for columns in db but not in model
    for col_name in db_columns:
        if col_name not in model_columns:
            differences.append(f"Column '{col_name}' exists in database but not in model")

    # Nullability must agree
    for col_name, column in model_columns.items():
        if col_name in db_columns and bool(column.nullable) != bool(db_columns[col_name]['nullable']):
            differences.append(f"Column '{col_name}' nullability differs")

    return differences

def cascading_foreign_keys(session: Session, table_name: str) -> Dict[str, str]:
    """Map each foreign key column of a table to the table it references,
    for keys declared ON DELETE CASCADE"""
    inspector = DBInspector(session)
    result = {}
    for fk in inspector.get_table_info(table_name)['foreign_keys']:
        if (fk.get('options') or {}).get('ondelete', '').upper() == 'CASCADE':
            for column in fk['constrained_columns']:
                result[column] = fk['referred_table']
    return result
