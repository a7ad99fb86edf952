"""
Standard SQL keyword lists.

Used by ``TokenizerConfig.standard()`` when no dialect-specific
configuration is supplied.
"""

RESERVED_WORDS = (
    "ACCESSIBLE", "ACTION", "AGAINST", "AGGREGATE", "ALGORITHM", "ALL", "ALTER",
    "ANALYSE", "ANALYZE", "AS", "ASC", "AUTOCOMMIT", "AUTO_INCREMENT", "BACKUP",
    "BEGIN", "BETWEEN", "BINLOG", "BOTH", "CASCADE", "CASE", "CHANGE", "CHANGED",
    "CHARACTER SET", "CHARSET", "CHECK", "CHECKSUM", "COLLATE", "COLLATION",
    "COLUMN", "COLUMNS", "COMMENT", "COMMIT", "COMMITTED", "COMPRESSED",
    "CONCURRENT", "CONSTRAINT", "CONTAINS", "CONVERT", "CREATE", "CROSS",
    "CURRENT_TIMESTAMP", "DATABASE", "DATABASES", "DAY", "DAY_HOUR", "DAY_MINUTE",
    "DAY_SECOND", "DEFAULT", "DEFINER", "DELAYED", "DELETE", "DESC", "DESCRIBE",
    "DETERMINISTIC", "DISTINCT", "DISTINCTROW", "DIV", "DO", "DROP", "DUMPFILE",
    "DUPLICATE", "DYNAMIC", "ELSE", "ENCLOSED", "END", "ENGINE", "ENGINES",
    "ESCAPE", "ESCAPED", "EVENTS", "EXEC", "EXECUTE", "EXISTS", "EXPLAIN",
    "EXTENDED", "FALSE", "FAST", "FIELDS", "FILE", "FIRST", "FIXED", "FLUSH", "FOR",
    "FORCE", "FOREIGN", "FULL", "FULLTEXT", "FUNCTION", "GLOBAL", "GRANT", "GRANTS",
    "HEAP", "HIGH_PRIORITY", "HOSTS", "HOUR", "HOUR_MINUTE", "HOUR_SECOND",
    "IDENTIFIED", "IF", "IGNORE", "IN", "INDEX", "INDEXES", "INFILE", "INSERT_ID",
    "INSERT_METHOD", "INTERVAL", "INTO", "INVOKER", "IS", "ISOLATION", "KEY", "KEYS",
    "KILL", "LEADING", "LEVEL", "LIKE", "LINEAR", "LINES", "LOAD", "LOCAL", "LOCK",
    "LOCKS", "LOGS", "LOW_PRIORITY", "MASTER", "MATCH", "MAX_ROWS", "MINUTE",
    "MINUTE_SECOND", "MODE", "MONTH", "NAMES", "NATURAL", "NOT", "NULL", "OFFSET",
    "ON DELETE", "ON UPDATE", "ONLY", "OPEN", "OPTIMIZE", "OPTION", "OPTIONALLY",
    "OUTFILE", "PARTITION", "PARTITIONS", "PRIMARY", "PRIVILEGES", "PROCEDURE",
    "PROCESS", "PROCESSLIST", "PURGE", "QUICK", "READ", "REFERENCES", "REGEXP",
    "RENAME", "REPAIR", "REPEATABLE", "REPLACE", "REQUIRE", "RESTRICT", "RETURNS",
    "REVOKE", "RLIKE", "ROLLBACK", "ROW", "ROWS", "ROW_FORMAT", "SCHEMA", "SECOND",
    "SECURITY", "SEPARATOR", "SERIALIZABLE", "SESSION", "SHARE", "SHOW", "SHUTDOWN",
    "SLAVE", "SONAME", "SOUNDS", "SQL", "SQL_CACHE", "SQL_NO_CACHE", "START",
    "STARTING", "STATUS", "STOP", "STORAGE", "STRAIGHT_JOIN", "STRING", "STRIPED",
    "SUPER", "TABLE", "TABLES", "TEMPORARY", "TERMINATED", "THEN", "TO", "TRAILING",
    "TRANSACTION", "TRIGGER", "TRUE", "TRUNCATE", "TYPE", "TYPES", "UNCOMMITTED",
    "UNIQUE", "UNLOCK", "UNSIGNED", "USAGE", "USE", "USING", "VARIABLES", "VIEW",
    "WHEN", "WITH", "WORK", "WRITE", "YEAR_MONTH",
)

RESERVED_TOPLEVEL_WORDS = (
    "ADD", "AFTER", "ALTER COLUMN", "ALTER TABLE", "DELETE FROM", "EXCEPT",
    "FETCH FIRST", "FROM", "GROUP BY", "GO", "HAVING", "INSERT INTO", "INSERT",
    "INTERSECT", "LIMIT", "MODIFY", "ORDER BY", "SELECT", "SET CURRENT SCHEMA",
    "SET SCHEMA", "SET", "UNION ALL", "UNION", "UPDATE", "VALUES", "WHERE",
)

RESERVED_NEWLINE_WORDS = (
    "AND", "CROSS APPLY", "CROSS JOIN", "ELSE", "INNER JOIN", "JOIN", "LEFT JOIN",
    "LEFT OUTER JOIN", "ON", "OR", "OUTER APPLY", "OUTER JOIN", "RIGHT JOIN",
    "RIGHT OUTER JOIN", "WHEN", "XOR",
)

FUNCTION_WORDS = (
    "ABS", "AVG", "CAST", "CEIL", "CEILING", "CHAR_LENGTH", "COALESCE", "CONCAT",
    "CONCAT_WS", "CONVERT", "COUNT", "CURRENT_DATE", "DATE", "DATE_ADD",
    "DATE_FORMAT", "DATE_SUB", "DATEDIFF", "EXISTS", "EXTRACT", "FLOOR",
    "GROUP_CONCAT", "IFNULL", "IN", "INSTR", "LAST_INSERT_ID", "LEFT", "LENGTH",
    "LOWER", "LTRIM", "MAX", "MIN", "MOD", "NOW", "NULLIF", "POSITION", "POWER",
    "REPLACE", "RIGHT", "ROUND", "RTRIM", "SUBSTR", "SUBSTRING", "SUM", "TRIM",
    "UPPER", "VALUES",
)
