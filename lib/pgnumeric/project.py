'project information'

#: project name
name = 'pgnumeric'

meaculpa = 'pgnumeric contributors'
abstract = 'PostgreSQL NUMERIC binary codec for exact decimal text'

version_info = (1, 0, 0)
version = '.'.join(map(str, version_info))
author = meaculpa
date = '2026-10-19'
